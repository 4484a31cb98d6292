"""Read the local Linux endpoint's files, processes, sockets, users, journal records and host details as rows."""

__version__ = "0.1.0"