from .models import ContainerLoad, CountedRecord, ItemRecord, Plan

__all__ = ["ItemRecord", "CountedRecord", "ContainerLoad", "Plan"]
