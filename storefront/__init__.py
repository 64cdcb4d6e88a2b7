"""Storefront: product catalog and transactional order service."""
