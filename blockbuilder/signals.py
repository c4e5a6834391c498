# blockbuilder/signals.py

from django.dispatch import Signal

# Sent once by BlockbuilderConfig.ready() after every block module has been
# imported. Receivers get block_types= and field_groups= registries.
platform_ready = Signal()
