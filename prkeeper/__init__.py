"""prkeeper - pull request automation: repo whitelist and cleanup of closed pull requests."""
