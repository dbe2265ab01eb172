"""
Database access layer for the parts catalog.

Includes:
- Supabase client bootstrap (anon key, stateless sessions)
- SQLAlchemy mirror of the tables created by supabase/migrations

DO NOT define RLS policies here. The migration is the source of truth for
what the hosted database enforces.
"""

from .client import create_supabase_client, get_supabase_client

__all__ = ["create_supabase_client", "get_supabase_client"]
