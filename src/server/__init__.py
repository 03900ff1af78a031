"""HTTP service exposing the mdlite renderer."""
