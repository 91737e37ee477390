"""Desktop viewer for sketching box outlines."""
