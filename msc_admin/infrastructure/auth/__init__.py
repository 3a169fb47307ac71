"""Auth vendor adapters."""

from .supabase_gateway import SupabaseAuthGateway

__all__ = ["SupabaseAuthGateway"]
