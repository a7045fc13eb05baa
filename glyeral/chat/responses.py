"""
Canned clinical responses for the recommendation chat panel.

Drug entries are keyed by the keyword that triggers them. Each drug has a
"why", "interactions" and "side_effects" answer.
"""

# =============================================================================
# DRUG RESPONSES
# =============================================================================

DRUG_RESPONSES: dict[str, dict[str, str]] = {
    "metformin": {
        "why": (
            "Metformin is recommended as **first-line therapy** per ADA 2025 Standards of Care.\n\n"
            "**Key factors:**\n"
            "- Effective HbA1c reduction with a long safety record\n"
            "- Proven cardiovascular safety profile\n"
            "- Low hypoglycemia risk as monotherapy\n"
            "- Cost-effective with extensive clinical evidence\n\n"
            "The 1000mg twice daily dose gives good glycemic reduction; titrate up from "
            "500mg to limit GI side effects."
        ),
        "interactions": (
            "Metformin combines well with the other recommended medications:\n\n"
            "- **+ Farxiga (Dapagliflozin):** Safe and complementary. Metformin lowers hepatic "
            "glucose output while Farxiga increases renal glucose excretion.\n"
            "- **+ Semaglutide:** Well tolerated; both lower HbA1c through different pathways.\n"
            "- **+ Glimepiride:** Use caution, hypoglycemia risk rises with sulfonylureas.\n\n"
            "**Note:** Monitor eGFR periodically. Metformin requires eGFR ≥ 30 mL/min."
        ),
        "side_effects": (
            "Common side effects of Metformin:\n\n"
            "- **GI symptoms** (most common): nausea, diarrhea, abdominal discomfort, usually "
            "resolving within 2-4 weeks\n"
            "- **Vitamin B12 deficiency:** check B12 yearly with long-term use\n"
            "- **Lactic acidosis:** rare but serious; risk rises with renal impairment\n\n"
            "**Mitigation:** start at 500mg, take with meals, consider the extended-release "
            "formulation if GI intolerance persists."
        ),
    },
    "farxiga": {
        "why": (
            "Farxiga (Dapagliflozin) has multiple guideline endorsements:\n\n"
            "- **KDIGO 2024:** strong recommendation for CKD benefit, slows kidney disease progression\n"
            "- **AHA:** heart failure protection with fewer hospitalizations\n\n"
            "**Additional benefits:** 2-3 kg typical weight loss, 3-5 mmHg blood pressure "
            "reduction, low hypoglycemia risk."
        ),
        "interactions": (
            "Farxiga interaction considerations:\n\n"
            "- **+ Metformin:** excellent combination, complementary mechanisms\n"
            "- **+ Insulin (Glargine):** insulin may need a 10-20% dose reduction\n"
            "- **+ Diuretics:** watch for volume depletion\n\n"
            "**Monitoring:** renal function at baseline and periodically; watch for "
            "ketoacidosis and genital mycotic infections."
        ),
        "side_effects": (
            "Common side effects of Farxiga:\n\n"
            "- **Genital mycotic infections**, more common in women\n"
            "- **Urinary tract infections:** mild increase in risk\n"
            "- **Volume depletion**, especially in elderly patients or with diuretics\n"
            "- **Diabetic ketoacidosis:** rare but important to recognize\n\n"
            "**Counseling:** stay hydrated and hold before major surgery or during acute illness."
        ),
    },
    "semaglutide": {
        "why": (
            "Semaglutide is recommended for glycemic and cardiovascular benefit:\n\n"
            "- **ADA 2025:** preferred for T2DM with overweight or obesity\n"
            "- **AHA:** cardiovascular risk reduction shown in SUSTAIN-6 and SELECT\n\n"
            "**Expected outcomes:** HbA1c reduction of 1.0-1.5% and 5-10% body weight loss. "
            "The weekly titration schedule limits GI side effects."
        ),
        "interactions": (
            "Semaglutide interaction considerations:\n\n"
            "- **+ Metformin:** safe, no dose adjustment needed\n"
            "- **+ Glimepiride:** increased hypoglycemia risk; consider halving the Glimepiride dose\n"
            "- **+ Insulin (Glargine):** insulin may need reduction\n"
            "- **+ Oral medications:** slowed gastric emptying may affect absorption"
        ),
        "side_effects": (
            "Common side effects of Semaglutide:\n\n"
            "- **GI symptoms:** nausea (usually transient), vomiting, diarrhea, reduced appetite\n"
            "- **Injection site reactions:** mild and infrequent\n"
            "- **Pancreatitis:** rare; watch for persistent severe abdominal pain\n\n"
            "**Mitigation:** titrate slowly, eat smaller meals, avoid high-fat foods at first."
        ),
    },
    "glargine": {
        "why": (
            "Glargine provides basal insulin coverage:\n\n"
            "- **ADA 2025:** basal insulin when HbA1c > 9% or with symptomatic hyperglycemia\n"
            "- Confidence is lower than the oral agents because of hypoglycemia risk\n\n"
            "**Before-dinner dosing** targets fasting glucose. A 10-unit start is conservative "
            "and can be titrated on fasting readings."
        ),
        "interactions": (
            "Glargine interaction profile:\n\n"
            "- **+ Metformin:** safe, adds insulin sensitization\n"
            "- **+ Farxiga:** Glargine may need a 10-20% reduction\n"
            "- **+ Semaglutide:** additive glucose lowering, monitor closely\n"
            "- **+ Glimepiride:** HIGH RISK of hypoglycemia, not recommended together\n\n"
            "**Titration:** 2 units every 3 days to a fasting target of 80-130 mg/dL."
        ),
        "side_effects": (
            "Common side effects of Glargine:\n\n"
            "- **Hypoglycemia:** the main risk; teach recognition and treatment\n"
            "- **Weight gain:** 1-2 kg on average in the first year\n"
            "- **Injection site lipodystrophy:** rotate injection sites\n\n"
            "**Safety:** provide a glucometer and a glucagon emergency kit."
        ),
    },
    "glimepiride": {
        "why": (
            "Glimepiride is a **second-line alternative** with a lower confidence score:\n\n"
            "- Indicated mainly when Metformin is not tolerated\n"
            "- Cost-effective sulfonylurea\n\n"
            "**Concerns:** hypoglycemia, weight gain, and less cardiovascular benefit than "
            "SGLT2 inhibitors or GLP-1 agonists. It carries a **warning status**."
        ),
        "interactions": (
            "Glimepiride has several important interactions:\n\n"
            "- **+ Insulin (Glargine):** HIGH RISK of hypoglycemia, avoid\n"
            "- **+ Semaglutide:** moderate risk, reduce the Glimepiride dose\n"
            "- **+ Metformin:** acceptable with glucose monitoring\n"
            "- **+ Farxiga:** generally safe, additive glucose lowering"
        ),
        "side_effects": (
            "Common side effects of Glimepiride:\n\n"
            "- **Hypoglycemia:** worse with skipped meals, exercise, alcohol, or insulin\n"
            "- **Weight gain:** 2-4 kg typical\n"
            "- **GI disturbances:** mild and uncommon\n\n"
            "**Counseling:** eat regular meals, carry glucose tablets, take before breakfast."
        ),
    },
}


# =============================================================================
# GENERAL RESPONSES
# =============================================================================

NO_RECOMMENDATIONS = (
    "No recommendations have been generated yet. Please generate recommendations "
    "first, and I can help you understand them."
)

NO_INTERACTIONS = "No recommendations available to analyze interactions."

SUMMARY_FOOTER = (
    "**Overall approach:** first-line Metformin combined with cardio-renal protective "
    "agents (Farxiga, Semaglutide) and basal insulin support, with Glimepiride as a "
    "fallback option.\n\n"
    "Would you like me to explain any specific recommendation in detail?"
)

INTERACTIONS_RESPONSE = (
    "**Drug Interaction Analysis** ({count} recommended medications)\n\n"
    "**Safe combinations:**\n"
    "- Metformin + Farxiga: synergistic, no dose adjustment\n"
    "- Metformin + Semaglutide: safe, complementary mechanisms\n\n"
    "**Requires monitoring:**\n"
    "- Farxiga + Glargine: may need 10-20% insulin dose reduction\n"
    "- Semaglutide + Glargine: additive hypoglycemia risk\n\n"
    "**Caution advised:**\n"
    "- Semaglutide + Glimepiride: reduce the Glimepiride dose\n"
    "- Glargine + Glimepiride: HIGH RISK, avoid concurrent use"
)

CONFIDENCE_RESPONSE = (
    "**Understanding Confidence Scores**\n\n"
    "Each score reflects how strongly a medication is supported for this patient:\n\n"
    "1. **Guideline alignment** with ADA, KDIGO and AHA\n"
    "2. **Patient-specific factors** such as labs and comorbidities\n"
    "3. **Safety profile** including contraindications\n\n"
    "**Interpretation:**\n"
    "- **90-100%:** strong recommendation, first-line choice\n"
    "- **70-89%:** good recommendation, well supported\n"
    "- **50-69%:** conditional, consider alternatives\n"
    "- **Below 50%:** weak, use only if alternatives are unavailable"
)

GUIDELINES_RESPONSE = (
    "**Referenced Clinical Guidelines**\n\n"
    "- **ADA 2025:** American Diabetes Association Standards of Care\n"
    "- **KDIGO 2024:** diabetes management in chronic kidney disease\n"
    "- **AHA:** cardiovascular risk management in diabetes\n\n"
    "Each medication card lists the guidelines that support it."
)

FALLBACK_RESPONSES = [
    "I can help with questions about the recommended medications, drug interactions, "
    "clinical guidelines, or confidence scores. Could you be more specific?",
    "I can only support decisions about the current recommendations. Is there anything "
    "about the recommended drugs I can help with?",
    "Try asking about a specific drug (e.g. 'Tell me about Metformin'), interactions, "
    "or guidelines.",
]
