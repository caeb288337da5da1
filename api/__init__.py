# api - HTTP interface to the pappus_kit engine
