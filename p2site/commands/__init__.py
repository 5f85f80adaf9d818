"""Click commands for the p2site CLI."""
