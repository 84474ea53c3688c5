from admin.routers.admin import router as admin_router
