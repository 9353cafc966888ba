"""
Core Package

Shared building blocks of the course platform: configuration, identity,
permissions, the error taxonomy and the integrations with external providers
(Stripe for payments, Mux for video).

Author: Course Platform Team
Version: 1.0.0
"""
