"""
Chat bounded context: domain layer.

- Wallet-identified users
- Groups mirrored from on-chain identifiers and their memberships
- Private and group message history
"""
