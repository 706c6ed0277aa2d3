"""HTTP session and network-related exceptions."""
