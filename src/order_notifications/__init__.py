"""UniHub order notifications — fan-out of emails, in-app records and pushes
for order lifecycle changes."""
