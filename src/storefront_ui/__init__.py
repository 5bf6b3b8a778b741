"""Storefront UI: presentation components for Django storefronts."""
