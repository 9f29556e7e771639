"""GitHub store contracts and the githubkit-backed adapter."""
