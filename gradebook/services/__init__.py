from gradebook.services.gradebook import GradebookService
from gradebook.services.items import ItemService

__all__ = ["GradebookService", "ItemService"]
