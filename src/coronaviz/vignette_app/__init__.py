"""NiceGUI page rendering the vignette sections."""
