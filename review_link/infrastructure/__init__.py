# Infrastructure Layer
# ====================
# Contains all external service integrations:
# - places/: Google Places Autocomplete proxy client
# - config/: Environment and settings management
#
# This layer can be replaced entirely without affecting the domain layer.
