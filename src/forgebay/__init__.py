"""Forgebay — drone reserve, regeneration and launch scheduling.

This package contains the reserve forge scheduler that keeps a mothership
stocked with drones, the capability protocols it uses to talk to the host
simulation, an in-memory sandbox world, and the status event plumbing.
"""

__version__ = "0.1.0"
