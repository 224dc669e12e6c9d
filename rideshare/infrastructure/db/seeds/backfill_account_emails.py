from __future__ import annotations

from sqlalchemy import text


def backfill_account_emails(engine) -> None:
    """Register emails of accounts created before ``public.account_emails`` existed.

    Safe to run repeatedly. If the same email is present in both account
    tables, the first one registered keeps it and the insert for the other is
    skipped.
    """
    with engine.begin() as conn:
        conn.execute(
            text(
                """
                INSERT INTO public.account_emails (email, identity_kind, identity_id, created_at)
                SELECT lower(email), 'passenger', id, created_at
                FROM public.passengers
                ON CONFLICT DO NOTHING
                """
            )
        )
        conn.execute(
            text(
                """
                INSERT INTO public.account_emails (email, identity_kind, identity_id, created_at)
                SELECT lower(email), 'driver', id, created_at
                FROM public.drivers
                ON CONFLICT DO NOTHING
                """
            )
        )
