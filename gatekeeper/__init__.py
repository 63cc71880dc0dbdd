"""Gatekeeper: signup/signin and role-gated generic CRUD API."""
