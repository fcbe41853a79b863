"""
Parking-lot reservation backend.

Serves the admin dashboard and the entrance/exit kiosks: slot inventory,
reservations, gate validation, history archival and reports.
"""
