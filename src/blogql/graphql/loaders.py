from strawberry.dataloader import DataLoader

from ..database import DataClient
from ..dbmodels import Users


class Loaders:
    """Per-request batch loaders."""

    def __init__(self, client: DataClient):
        self._client = client
        self.user_loader = DataLoader(load_fn=self.load_users)

    async def load_users(self, keys: list[str]) -> list[Users | None]:
        """Batch load users by ID."""
        users = await self._client.users.find_many_by_ids(keys)
        users_map = {user.id: user for user in users}
        return [users_map.get(key) for key in keys]
