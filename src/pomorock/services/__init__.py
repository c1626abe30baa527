"""Services for Pomorock: configuration, player discovery, usage history."""
