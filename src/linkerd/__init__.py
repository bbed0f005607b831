"""
Linkerd - version compatibility and update checks for the CLI and control plane
"""
