"""robocheck.matcher: path patterns and rule resolution."""
