#!/usr/bin/env python
# -*- coding: utf-8 -*-

import covtidy as ct


def main():
    resolver = ct.GeoKeyResolver(country="US")
    for key in ["Fairfield, Connecticut, US", "Connecticut, US", "US"]:
        print(resolver.decompose(key))
    # Malformed keys are reported and skipped
    print(resolver.split(["Connecticut, US", "A, B, C, US"], errors="report"))


if __name__ == "__main__":
    main()
