"""
Artemis Gateway Root Module

Single JSON surface in front of heterogeneous smart-home back ends
(cloud lights, TV remote service, camera bridge).

Layer Structure:
- Domain: Entities, error taxonomy, gateway contracts and command rules
- Application: Use cases (router, aggregator) and DTOs
- Infrastructure: Upstream HTTP adapters and response normalizers
- Presentation: FastAPI routers, error envelope and middleware
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
