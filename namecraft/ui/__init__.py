"""Qt integration layer of namecraft."""
