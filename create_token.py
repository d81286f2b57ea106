"""Print a bearer token for a user id (default: the seeded user ``1``).

Usage:
    python create_token.py [user_id] [lifetime_seconds]
"""
import sys

from bookwise_api.app.core.security import create_access_token

user_id = sys.argv[1] if len(sys.argv) > 1 else "1"
lifetime = int(sys.argv[2]) if len(sys.argv) > 2 else 365 * 24 * 60 * 60
print(create_access_token({"sub": user_id}, expires_delta=lifetime))
