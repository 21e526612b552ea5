"""
Synthesis - caregiver support backend

Backend services for the Synthesis caregiver app: a pictogram library,
an ABC (Antecedent-Behavior-Consequence) behavior diary analyzed by a
hosted language model, and an SOS screen with calming crisis guidance.

IMPORTANT: Model output is advisory text for parents. It is shown
verbatim and never replaces professional care.
"""

__version__ = "0.1.0"
__author__ = "Synthesis Studio"
