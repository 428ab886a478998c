# gatecore/infra/__init__.py
"""
Infrastructure providers (storage-backed collaborators).
"""
