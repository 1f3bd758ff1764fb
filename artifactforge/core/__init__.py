"""Build-graph construction core: dispatch, resolution, registration, ordering."""
