"""
Interfaces Layer

Presentation adapters driving the application services.
"""
