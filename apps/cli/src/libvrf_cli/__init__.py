"""Command-line front end for libvrf."""
