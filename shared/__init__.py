"""
Shared Kernel

Base classes and plumbing shared by the booking context: domain building
blocks, the message bus, the unit of work and the API exception handler.
"""
