"""
FastAPI routers grouped por domínio (usuarios, agendamentos, reviews, fidelidade).

Each module exposes an APIRouter included by ``vipcortes.app.create_app``.
Routers read their service from ``request.app.state`` and only translate
between JSON bodies and service calls; errors travel as ServiceError and are
rendered by the handlers registered in the app.
"""
