"""OpenStreetMap model and A* route planning."""