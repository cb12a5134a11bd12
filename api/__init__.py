# api - REST surface for the mini_arbor engine
