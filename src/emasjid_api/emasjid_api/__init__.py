"""eMasjid administration API package.

Organized by feature modules (members, dependents, payments, cadangan,
tetapan, ...) with a thin Flask controller layer over service/repository
layers.
"""
