from fastapi import APIRouter, Depends

from authguard.dependencies import get_current_admin, get_current_user
from authguard.guards import AuthContext

from app.schemas.users import AdminDashboardResponse, AdminDetails, ProfileResponse


router = APIRouter(tags=["profile"])


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(context: AuthContext = Depends(get_current_user)):
    return ProfileResponse(
        message="Profile retrieved successfully!",
        user=context.user,
    )


@router.get("/admin/dashboard", response_model=AdminDashboardResponse)
async def admin_dashboard(context: AuthContext = Depends(get_current_admin)):
    """
    Admin-only. Echoes the id, email and roles of the authenticated admin.
    """
    admin = context.user
    return AdminDashboardResponse(
        message="Welcome to the Admin Dashboard!",
        admin_details=AdminDetails(
            user_id=admin.id,
            email=admin.email,
            roles=admin.roles,
        ),
    )
