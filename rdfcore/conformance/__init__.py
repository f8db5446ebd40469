"""Datasets, isomorphism checks, manifest reading and evaluation of RDF conformance tests."""