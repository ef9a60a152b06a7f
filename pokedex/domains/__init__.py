"""Domain layer (navigation state and creature display mapping).

Domain modules should not depend on UI or perform I/O. The catalog client is
injected into the services layer, which calls into these modules.
"""
