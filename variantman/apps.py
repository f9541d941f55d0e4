from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class VariantmanConfig(AppConfig):
    name = "variantman"
    verbose_name = _("Variantes de Produto")
