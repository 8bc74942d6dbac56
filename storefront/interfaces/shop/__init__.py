"""HTTP interface for the shop bounded context."""
