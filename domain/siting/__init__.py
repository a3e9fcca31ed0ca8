"""Siting Bounded Context.

Responsible for candidate-site generation and ranking:
- Value Objects: GeographicContext, ScoringFactors, ScoringWeights, OverlapSite
- Services: haversine distance, regional classifier, scoring model,
  synergy analyzer, site generator
- Ports: InfrastructureProvider
"""
