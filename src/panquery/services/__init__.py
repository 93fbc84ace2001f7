"""Service layer: query operations wrapped in :class:`ServiceResult`."""
