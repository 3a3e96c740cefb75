"""
Cazan Points Test Suite

Structure:
- unit/: store, value types, config, logging, CLI and HTTP API in isolation
- integration/: a build step writing points and consumers reading them back
"""
