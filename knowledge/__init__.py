"""
Hygieia knowledge base assets.

Contains the reference condition records used for symptom matching:
- conditions/conditions.yaml: overview, symptoms, causes and risk factors,
  diagnosis, treatment, home remedies and exercises per condition
"""
