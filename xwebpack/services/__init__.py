"""External tools xwebpack drives: git, npm, yarn, DNS."""
