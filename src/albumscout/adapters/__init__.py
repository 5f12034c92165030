"""Platform adapters and shared HTTP plumbing."""
