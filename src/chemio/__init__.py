"""Entrada/salida de moléculas: documentos JSON y conversión con RDKit."""
