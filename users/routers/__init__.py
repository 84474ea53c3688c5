from users.routers.auth import router as auth_router
from users.routers.roles import router as roles_router
from users.routers.users import router as users_router
