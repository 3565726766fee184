"""HTTP API over the market activity service."""
