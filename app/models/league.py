MEMBERSHIP_ACCEPTED = "accepted"  # accepted | invited
