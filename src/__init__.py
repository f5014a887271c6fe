"""Supabase to Notion record sync bridge."""
