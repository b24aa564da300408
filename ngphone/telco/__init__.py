"""Nigerian mobile number package.

Normalizes any spelling of a Nigerian mobile number to the canonical
``+234`` + 10 digits form, attributes it to a network operator by its
4- or 5-digit prefix, and caches the derived ``PhoneInfo`` records.

Entry points
------------
``ngphone.telco.service.PhoneService``      owned state + every public operation
``ngphone.telco.normalizer.normalize_phone`` stateless normalization
``ngphone.telco.display.format_for_display`` grouped rendering for humans

Throwing operations raise ``ngphone.telco.errors.PhoneValidationError``
subclasses; safe, batch and info operations never do.
"""
