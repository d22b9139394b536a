"""Domain layer for spendbook application.

Services are imported from their own modules (e.g.
``spendbook.domain.csv_import``) so the database layer can depend on the
entities here without an import cycle.
"""
