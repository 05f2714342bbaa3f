"""Entry points that drive the clinic registry."""
