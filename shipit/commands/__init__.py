"""Click commands exposed by the shipit CLI."""
