"""
Synthesis Infrastructure Layer

External integrations: the hosted language model, metrics and error tracking.
"""
