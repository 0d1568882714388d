"""
User Accounts Backend — root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic, and infrastructure (MongoDB, SMTP email, image storage) for
user listing, profile management and email-verified registration.
"""
