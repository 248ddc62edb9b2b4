"""School demo package.

Feature modules (items, students, courses, attendance, users) each carry a
model, a repository interface with its MySQL implementation, a service and a
thin Flask controller. ``proxy`` is the separate static/reverse-proxy process.
"""
