"""Per-frame systems: input dispatch, arcade physics and collisions."""
