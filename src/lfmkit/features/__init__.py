"""Feature packages: session authentication and the service collaborator base."""
