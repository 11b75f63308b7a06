"""Service layer — ERN operations returning :class:`ServiceResult`."""
