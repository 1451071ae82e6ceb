"""linkgate: verify links and images in staged markdown documents."""
