"""Click commands for freightbooks reports."""
