"""Simulated pressure monitor: GPIO port, state machines and the super loop."""