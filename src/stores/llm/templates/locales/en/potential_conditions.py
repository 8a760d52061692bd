from string import Template

potential_conditions_prompt = Template("\n".join([
    "You are a medical AI assistant. A user has described the following symptoms: $symptoms.",
    "$image_section",
    "Based on all this information, suggest a list of potential medical conditions that could be related.",
    "For each condition, provide:",
    '1. "condition": The name of the potential medical condition (string).',
    '2. "explanation": A concise explanation of the condition and its relevance to the symptoms, '
    "also mentioning how the image (if provided) aligns or contributes to this thought (string).",
    '3. "distinguishingSymptoms": An array of up to 3 key symptoms (strings) that help distinguish this condition '
    "from others that might present similarly based on the initial user input. Be concise.",
    "",
    "Return your response *only* as a JSON array of objects. Each object in the array must adhere to this structure.",
    "Example of a single object:",
    "{",
    '  "condition": "Common Cold",',
    '  "explanation": "A viral infection of the upper respiratory tract, often causing runny nose, sore throat, and cough, '
    'which aligns with some of the reported symptoms. If an image was provided showing a red throat, this would be consistent.",',
    '  "distinguishingSymptoms": ["Runny or stuffy nose", "Mild body aches", "Sneezing"]',
    "}",
    "Prioritize conditions that are most likely to be related to the symptoms and image (if any). "
    "Limit your response to the top $max_conditions most relevant potential conditions.",
    "Ensure your entire output strictly adheres to this JSON array format and the specified object structure.",
]))

image_section = Template(
    "They have also provided an image related to their symptoms, attached to this message."
)
