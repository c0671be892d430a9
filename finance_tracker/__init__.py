"""Finance Tracker: transaction creation and CSV import services."""
