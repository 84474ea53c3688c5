from links.routers.links import router as links_router
