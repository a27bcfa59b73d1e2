"""Boundary adapters for external services (S3, Rekognition, Stripe)."""
