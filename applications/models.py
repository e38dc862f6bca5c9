import uuid

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


# Enums as TextChoices
class ApplicationState(models.TextChoices):
    PENDING = 'Pending', _('Pending')
    ACTIVATED = 'Activated', _('Activated')
    IN_REVIEW = 'InReview', _('In Review')
    CLOSED = 'Closed', _('Closed')
    DECLINED = 'Declined', _('Declined')


class Person(models.Model):
    first_name = models.CharField(max_length=150, blank=True)
    surname = models.CharField(max_length=150, blank=True)

    class Meta:
        verbose_name = 'Person'
        verbose_name_plural = 'People'

    def __str__(self):
        return f"{self.first_name} {self.surname}"


class LegalEntity(models.Model):
    name = models.CharField(max_length=255)
    registration_number = models.CharField(max_length=100, blank=True)

    class Meta:
        verbose_name = 'Legal Entity'
        verbose_name_plural = 'Legal Entities'

    def __str__(self):
        return self.name


class Review(models.Model):
    reason = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.reason or 'Review'


class Application(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    state = models.CharField(
        max_length=20,
        choices=ApplicationState.choices,
        default=ApplicationState.PENDING,
    )
    reference_number = models.CharField(max_length=50, unique=True)
    date = models.DateField(help_text="Date the application was submitted")
    person = models.ForeignKey(Person, on_delete=models.PROTECT, related_name='applications')
    is_legal_entity = models.BooleanField(default=False)
    legal_entity = models.ForeignKey(
        LegalEntity,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='applications',
    )
    current_review = models.ForeignKey(
        Review,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='applications',
        help_text="Only set while the application is in review",
    )

    class Meta:
        ordering = ['-date', 'reference_number']

    def __str__(self):
        return f"{self.reference_number} ({self.get_state_display()})"


class Product(models.Model):
    application = models.ForeignKey(Application, on_delete=models.CASCADE, related_name='products')
    name = models.CharField(max_length=255)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['position', 'id']

    def __str__(self):
        return self.name


class Fund(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='funds')
    name = models.CharField(max_length=255)
    amount = models.FloatField(default=0.0)
    fees = models.FloatField(default=0.0)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ['position', 'id']

    def __str__(self):
        return self.name


class SingletonModel(models.Model):
    """Abstract base class for singleton models"""

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        self.pk = 1
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        obj, created = cls.objects.get_or_create(pk=1)
        return obj


class DocumentConfiguration(SingletonModel):
    support_email = models.EmailField(blank=True, help_text="Shown on every generated document")
    signature = models.TextField(blank=True, help_text="Closing signature for generated documents")
    tax_rate = models.FloatField(
        default=1.0,
        validators=[MinValueValidator(0.0)],
        help_text="Multiplier applied to each fund's net amount",
    )

    class Meta:
        verbose_name = 'Document Configuration'
        verbose_name_plural = 'Document Configuration'

    def __str__(self):
        return "Document Configuration"
