from uuid import UUID

USER_1 = UUID("00000000-0000-0000-0000-000000000001")
USER_2 = UUID("00000000-0000-0000-0000-000000000002")

# Tests pick the acting user with this header instead of a real Supabase JWT
TEST_USER_HEADER = "X-Test-User"


def as_user(user_id: UUID) -> dict[str, str]:
    return {TEST_USER_HEADER: str(user_id)}
