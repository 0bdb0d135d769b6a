"""HTTP API for PageGist."""
