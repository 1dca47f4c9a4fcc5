"""On-screen text widgets."""
