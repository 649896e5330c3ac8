"""HTTP API: health endpoints and versioned module routers.

The root router lives in ``citizen_services.api.router``; it is not
re-exported here because building it imports every feature module.
"""
