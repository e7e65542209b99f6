"""Storefront: products, carts, customer balances and checkout on Protean."""
