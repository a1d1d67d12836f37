from django.db import models


class ContactMessage(models.Model):
    """A contact-form submission. Rows are never updated or deleted by the API."""

    name = models.TextField()
    email = models.TextField()
    message = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
