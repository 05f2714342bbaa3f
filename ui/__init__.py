"""Web view over the clinic registry."""
