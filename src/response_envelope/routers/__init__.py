from response_envelope.routers.demo_router import router as demo_router

__all__ = ["demo_router"]
