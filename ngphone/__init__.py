"""ngphone: Nigerian mobile number normalization, validation and classification."""
