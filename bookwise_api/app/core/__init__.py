"""
Core building blocks: settings, logging, error taxonomy, token helpers,
simulated latency and the in‑memory entity store.
"""
