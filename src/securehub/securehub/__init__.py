"""SecureHub attendance package.

Organized by feature modules (users, network, attendance, sessions, admin)
with a thin Flask controller layer over service/repository layers. All data
lives in an external record store; the app keeps no state of its own.
"""
