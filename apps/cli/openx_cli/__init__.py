"""openx command line interface"""
