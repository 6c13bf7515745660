import hypothesis

hypothesis.settings.register_profile(
    "torchchroma",
    deadline=None,
    max_examples=50,
)
hypothesis.settings.load_profile("torchchroma")
