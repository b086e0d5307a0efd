"""Agent URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.agents.views import AgentViewSet

router = SimpleRouter(trailing_slash=False)
router.register("vermittler", AgentViewSet, basename="agent")

urlpatterns = router.urls
